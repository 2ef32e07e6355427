"""
SocialNet Backend — API Routes Package
======================================

Route Inventory:
    - home.py:     GET  /                         (welcome)
    - health.py:   GET  /health                   (service health check)
    - users.py:    POST /users/register, POST /users/login,
                   GET  /users, GET /users/me
    - posts.py:    POST /posts, GET /posts
    - groups.py:   POST /groups, GET|POST /groups/{groupId}/posts
    - messages.py: POST /messages, GET /messages

Routes stay thin: parse the request, resolve the caller through the
Access Guard where required, call one service method, return its model.
"""
