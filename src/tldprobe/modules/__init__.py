"""Probing pipeline: candidates, gate, prober, worker pool and reporting."""
