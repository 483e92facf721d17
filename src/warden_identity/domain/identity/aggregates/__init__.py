from warden_identity.domain.identity.aggregates.identity import Identity, NewIdentity

__all__ = ["Identity", "NewIdentity"]
