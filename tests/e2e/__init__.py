"""
End-to-end test suite for printsink.

These tests build real outputs (worker threads, files, clipboard doubles,
YAML configuration) and check the final observable state of complete
print workflows.
"""
