"""
Exceptions raised by the store.
"""


class DuplicateRegistrationError(Exception):
    """
    A distinct object was registered under a key that is already taken.

    This signals a bug in the producer (the parser failed to deduplicate
    declarations) and is not recovered internally.
    """

    def __init__(self, collection: str, key: str):
        self.collection = collection
        self.key = key
        super().__init__(f"Duplicate registration in {collection}: {key}")
