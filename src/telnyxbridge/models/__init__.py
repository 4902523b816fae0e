from .user import User
from .thread import Thread
from .participant import Participant
from .message import Message

__all__ = ["User", "Thread", "Participant", "Message"]
