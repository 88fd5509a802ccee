"""Bundled parking layout manifests."""
