"""HTTP controllers for the offline queue."""
