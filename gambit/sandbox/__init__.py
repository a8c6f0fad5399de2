"""
Sandbox Host Module
"""

from .host import SandboxHost, SandboxActor, SandboxWeapon, SandboxForm, SandboxRef
from .input_handler import InputHandler

__all__ = [
    'SandboxHost', 'SandboxActor', 'SandboxWeapon', 'SandboxForm', 'SandboxRef',
    'InputHandler'
]
