"""Systems-programming tools: a Unix V6 disk image reader, a typed string list, a process ring and a pipeline shell."""

__version__ = "0.1.0"