"""deptctl: department directory interpreter and line search CLI."""

__version__ = "0.1.0"
