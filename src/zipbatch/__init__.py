"""zipbatch - split large ZIP archives into bounded batches."""

__version__ = "0.1.0"
