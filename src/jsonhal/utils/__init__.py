"""Small parsing helpers shared by the decoder."""
