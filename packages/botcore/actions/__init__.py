from .base import Action
from .interaction_create import InteractionCreateAction, resolve_structure_name
from .manager import ActionsManager
