"""Subspecifications: field, hash, curve, Merkle tree and certificate binding."""
