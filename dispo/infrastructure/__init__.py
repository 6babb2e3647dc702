"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer. This is where Firestore, Firebase
Storage and Firebase Authentication integrations live.
"""
