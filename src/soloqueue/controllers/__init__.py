from soloqueue.controllers.queue_manager import QueueManager
from soloqueue.controllers.social import IgnoreRegistry

__all__ = ["IgnoreRegistry", "QueueManager"]
