"""Document store access."""

from db.firestore import FirestoreService

__all__ = ["FirestoreService"]
