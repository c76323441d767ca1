"""
OTP Auth - Core Module

This module contains configuration, logging setup and timer utilities.
"""

from otpauth.core.config import Settings, get_settings, settings
from otpauth.core.timers import PeriodicTimer

__all__ = ["Settings", "settings", "get_settings", "PeriodicTimer"]
