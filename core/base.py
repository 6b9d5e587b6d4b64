from sqlalchemy.orm import declarative_base

# Shared declarative base for every GTFS read model
Base = declarative_base()
