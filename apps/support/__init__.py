"""Support app package.

Contact-support inbox: visitors submit messages, the support mailbox is
alerted, and admins reply by email and resolve the message.
"""
