"""Shape point retrieval.

Each shape is one query; for several shapes the queries run in parallel on a
thread pool, each worker with its own session. Results always come back in
the order the shape ids were requested.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed, TimeoutError as FuturesTimeoutError
from typing import Callable, Dict, List, Sequence, Union

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from src.gtfs_bc.shape.domain.entities import Shape
from src.gtfs_bc.shape.infrastructure.models import ShapePointModel

logger = logging.getLogger(__name__)


class ShapeRepository:
    """Read access to shape points."""

    def __init__(
        self,
        session: Session,
        session_factory: Callable[[], Session],
        max_workers: int = 8,
        timeout_seconds: Union[int, float] = 30,
    ):
        self.session = session
        self.session_factory = session_factory
        self.max_workers = max_workers
        self.timeout_seconds = timeout_seconds

    @staticmethod
    def _load_shape(session: Session, agency_id: str, shape_id: str) -> Shape:
        rows = (
            session.query(ShapePointModel)
            .filter(
                ShapePointModel.agency_id == agency_id,
                ShapePointModel.shape_id == shape_id,
            )
            .order_by(ShapePointModel.sequence)
            .all()
        )
        if not rows:
            raise NotFoundError(f"No shapes with shape_id {shape_id}.")
        return Shape.from_models(shape_id, rows)

    def get_shape(self, agency_id: str, shape_id: str) -> Shape:
        """Points of one shape ordered by sequence, NotFoundError if it has none."""
        return self._load_shape(self.session, agency_id, shape_id)

    def _load_shape_in_new_session(self, agency_id: str, shape_id: str) -> Shape:
        """Load a shape using a new database session (for thread safety)."""
        session = self.session_factory()
        try:
            return self._load_shape(session, agency_id, shape_id)
        finally:
            session.close()

    def get_shapes_by_shape_ids(self, agency_id: str, shape_ids: Sequence[str]) -> List[Shape]:
        """Shapes for ``shape_ids``, in the same order.

        Fails as a whole: the first lookup that raises (e.g. NotFoundError for
        a shape without points) cancels the pending ones and is re-raised.
        """
        shape_ids = list(shape_ids)

        if self.max_workers <= 1 or len(shape_ids) <= 1:
            return [self.get_shape(agency_id, shape_id) for shape_id in shape_ids]

        shapes: Dict[str, Shape] = {}
        workers = min(self.max_workers, len(shape_ids))

        # No context manager: its exit would join lookups that are still running
        executor = ThreadPoolExecutor(max_workers=workers)
        future_to_shape_id = {
            executor.submit(self._load_shape_in_new_session, agency_id, shape_id): shape_id
            for shape_id in shape_ids
        }

        try:
            for future in as_completed(future_to_shape_id, timeout=self.timeout_seconds):
                shapes[future_to_shape_id[future]] = future.result()
        except FuturesTimeoutError:
            logger.error(
                f"Timeout loading {len(shape_ids)} shapes for agency {agency_id} "
                f"after {self.timeout_seconds}s"
            )
            executor.shutdown(wait=False, cancel_futures=True)
            raise
        except Exception as e:
            logger.error(f"Error loading shapes for agency {agency_id}: {e}")
            executor.shutdown(wait=False, cancel_futures=True)
            raise

        executor.shutdown(wait=True)
        logger.debug(f"Loaded {len(shapes)} shapes for agency {agency_id} with {workers} workers")
        return [shapes[shape_id] for shape_id in shape_ids]
