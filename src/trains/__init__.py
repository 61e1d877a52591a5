"""Train catalogue: read-only listing and details of seeded trains."""
