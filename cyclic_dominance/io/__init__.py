"""Artifact layout and Parquet schemas."""
