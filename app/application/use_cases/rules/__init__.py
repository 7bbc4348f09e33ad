"""Use cases for managing compliance rules."""

from .create_rule import create_rule
from .delete_rule import delete_rule
from .get_rule import get_rule
from .list_rules import list_rules
from .set_rule_active import set_rule_active
from .update_rule import update_rule

__all__ = [
    "create_rule",
    "delete_rule",
    "get_rule",
    "list_rules",
    "set_rule_active",
    "update_rule",
]
