"""Configuration, logging, error types and startup data loading."""
