"""Optional integrations with third-party storage backends."""
