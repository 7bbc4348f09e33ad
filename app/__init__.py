"""Product compliance service.

Rules authored by administrators are stored alongside the products they
inspect; ``app.domain.rules`` holds the codec and the evaluator.
"""
