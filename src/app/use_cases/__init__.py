"""
Use Cases

Organized by area:
- access_keys/: Issuance and withdrawal of one-time access keys
- auth/: Login paths, session verification, logout
- recovery/: Security question / backup code -> reset token -> new master key
- dean/: Dean config and backup code rotation
- sessions/: Session registry and revocation
- audit/: Audit trail

Import from subdirectories.
"""
