"""Core workspace logic for sbtctl."""
