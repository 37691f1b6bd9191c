"""
Quiz answers relay: fetches a quiz's answers and posts them to a Discord webhook.
"""
