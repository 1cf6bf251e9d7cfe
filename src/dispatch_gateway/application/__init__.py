"""Application – message dispatch and handler invocation logging."""
