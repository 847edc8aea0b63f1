"""
Cargo bounded context: domain layer.

- Entities and value objects (cargo, itinerary, handling events)
- Error taxonomy
- Ports for the booking, handling and routing services and repositories
- Default booking and handling services
"""
