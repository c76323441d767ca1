"""
OTP Auth

Passwordless email + one-time code authentication demo.
"""

__version__ = "0.1.0"
