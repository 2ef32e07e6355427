"""
SocialNet Backend — Security Layer
==================================

What:  Who is calling and whether they proved it.

    passwords.py: CredentialManager (argon2id hash/verify)
    tokens.py:    TokenService (issue/verify signed, expiring JWTs)
    guard.py:     Access Guard dependency (Authorization header → Identity)
"""
