"""HTTP Surface — dashboard routes, service providers, and error envelope.

Invariants:
    - Every failure leaves as {"error": {...}}; store causes stay in the logs
    - Writes answer with a redirect to the listing they revalidated
"""
