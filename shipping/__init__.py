"""
Cargo Shipping: booking and handling of cargo over HTTP.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - cargo: Booking, routing and handling of shipments.

Layers:
    - domain: Entities, ports (ABCs), errors and the default services.
    - application: Commands, result envelopes and use cases (invokers).
    - infrastructure: In-memory adapters implementing domain ports.
    - interfaces: Operation tables, request decoders, response schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
