"""Shared Kernel Interfaces"""

from src.service.shared_kernel.app.interface.i_clock import IClock

__all__ = ['IClock']
