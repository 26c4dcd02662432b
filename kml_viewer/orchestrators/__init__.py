"""Upload orchestration.

Manages the end-to-end handling of one uploaded KML file:
1. Validate and decode the upload
2. Extract counts, length records and map elements
3. Build the UI report, or a single structured error
"""
