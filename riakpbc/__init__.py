"""Message encoding and decoding for the Riak protocol buffers interface."""

__version__ = "0.1.0"