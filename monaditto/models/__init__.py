"""Outcome value types shared by the normalizer and the folding engine."""
