"""HTTP layer of the Comic Store API."""
