"""Rendering, extraction and iteration for the CCTV Paris 2024 pages."""
