"""
Profile validation rules and the validator that applies them.
"""

from .profile_rules import build_profile_rules
from .profile_validator import ProfileValidator
from .rule_config import RuleConfigBuilder
from .sanitizer import sanitize_profile

__all__ = ["ProfileValidator", "RuleConfigBuilder", "build_profile_rules", "sanitize_profile"]
