"""
Staffing bounded context — domain layer.

This module contains all domain logic for the staffing context:
- Pending registrations and their promotion to croupiers
- Event image policy
- Roster (CSV) rendering
- Postulations (one per croupier and event)
"""
