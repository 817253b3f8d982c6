"""Click plumbing for the randclass command.

The command itself lives in :mod:`randclass.cli`; this package holds the
shared context object and the Click command class it is built on.
"""
