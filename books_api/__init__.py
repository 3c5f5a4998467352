"""Books API: CRUD over a file-backed collection of book records."""
