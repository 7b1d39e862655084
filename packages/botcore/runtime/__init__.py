from .deprecation import INTERACTION_ALIAS_NOTICE, DeprecationNotice
