"""Users app package.

Defines the custom user model (email login, ``user``/``admin`` roles,
wish list) together with the authentication, profile and admin APIs.
Use ``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout
the project.
"""
