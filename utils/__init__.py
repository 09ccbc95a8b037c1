"""Caption parsing, YouTube and DeepSRT clients, and output formatting."""
