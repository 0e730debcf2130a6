from enum import StrEnum


class PinStatus(StrEnum):
    """Per sensor pin wiring status"""

    NOT_CONNECTED = "not-connected"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class GroupState(StrEnum):
    """Visual state of a microcontroller pin group"""

    COLLAPSED = "collapsed"
    EXPANDED = "expanded"


class ConflictPolicy(StrEnum):
    """
    How a session treats a microcontroller pin that is already claimed:
    REJECT: raise ConflictError and leave the store untouched (default)
    ALLOW: accept the write and let the validator flag it (deprecated)
    """

    REJECT = "reject"
    ALLOW = "allow"
