"""Build a cross-referenced API object graph from Doxygen XML output."""
