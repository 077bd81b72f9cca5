"""
Typed services, one per REST resource.

Each service only knows its path template and the model to decode into;
all HTTP and pagination work is done by core.ResourceClient.
"""

from .participants import VideoParticipantService
from .rooms import RoomService
from .sims import SimService

__all__ = ["RoomService", "SimService", "VideoParticipantService"]
