"""
SubscribePro API services

- payment_profile_service: payment profile vault
- webhook_service: webhook events
"""
