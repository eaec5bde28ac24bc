"""
Custom exceptions for the application.
Centralized error handling for the service layer.
"""


class EntityNotFoundError(Exception):
    """
    Raised when an update or delete targets an id that is not in the store.

    A plain lookup of a missing id returns None instead; this exception is
    reserved for mutations.
    """

    def __init__(self, entity_name: str, entity_id: str):
        super().__init__(f"{entity_name} not found with ID: {entity_id}")
        self.entity_name = entity_name
        self.entity_id = entity_id
