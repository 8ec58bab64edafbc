"""Rendering of ServiceResult for terminals and machines."""
