# Routes package init
"""
ForumGuard Backend — API Routes Package
=========================================

Route Inventory:
    - validation.py:  POST /api/validate                     (screen one text field)
    - engagement.py:  GET  /api/engagement/threshold         (required minimum)
                      GET  /api/engagement                   (all students)
                      GET  /api/engagement/{username}        (one student)
    - posts.py:       GET  /api/posts                        (pinned-first listing)
                      GET  /api/posts/pins                   (pin slot usage)
                      GET  /api/posts/{post_id}              (one post, 404 if absent)
                      GET  /api/users/{username}/reply-alert (unread reply badge)
    - health.py:      GET  /health                           (service health check)

Routes stay thin: build the service from the request's repository, call
it, return the schema. Errors are raised, never formatted here.
"""
