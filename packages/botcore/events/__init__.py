from .bus import EventBus
from .types import EventHandler, Subscription
