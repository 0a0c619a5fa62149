"""Kernel security – authenticated principal and its ambient context."""
from radioking.kernel.security.principal import Principal
from radioking.kernel.security.security_context import SecurityContext

__all__ = ["Principal", "SecurityContext"]
