"""Infrastructure: configuration, logging, sentiment model and in-memory stores."""
