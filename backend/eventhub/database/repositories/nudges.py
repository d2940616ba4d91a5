"""
NudgeRepository

MongoDB operations for the 'nudges' collection. Nudges are create-only
through the API; the inherited read helpers serve tests and tooling.
"""

from eventhub.config import settings
from eventhub.database.repositories.base import BaseRepository


class NudgeRepository(BaseRepository):
    collection_name = settings.nudges_collection
