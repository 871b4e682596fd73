"""ORM Models: SQLAlchemy declarative models for the sample dataset.

Invariants:
    - All models inherit from Base (db/base.py)
    - Company is the only entity with a write path

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete for migrations and tests
"""

from sample_api.models.agent import Agent  # noqa: F401
from sample_api.models.company import Company  # noqa: F401
from sample_api.models.customer import Customer  # noqa: F401
