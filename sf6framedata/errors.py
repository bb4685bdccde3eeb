from typing import Optional


class FrameDataError(Exception):
    pass


class TransportError(FrameDataError):
    """A character's data page could not be fetched."""

    def __init__(self, character_id: str, url: str, reason: Optional[str] = None):
        self.character_id = character_id
        self.url = url
        msg = f"failed to fetch frame data for {character_id} ({url})"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class UnknownCharacter(FrameDataError):
    def __init__(self, query: str):
        self.query = query
        super().__init__(f"Unknown character: {query}")


class UnknownMove(FrameDataError):
    def __init__(self, character_id: str, query: str):
        self.character_id = character_id
        self.query = query
        super().__init__(f"Unknown move for {character_id}: {query}")
