from enum import Enum


class RequestState(Enum):
    IDLE = "IDLE"          # Nothing sent yet / last result acknowledged
    PENDING = "PENDING"    # Request in flight
    SUCCESS = "SUCCESS"    # Last request accepted by the backend
    ERROR = "ERROR"        # Last request failed (no automatic retry)
