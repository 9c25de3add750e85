"""Service layer: turns raw input into a ServiceResult."""
