"""Answer data model."""
