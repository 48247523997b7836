# src/mips_tracer/arch/mips/__init__.py
"""
MIPS32 (subset) Architecture Package
"""
from .cpu import MipsCpu
from .state import MipsCpuState
