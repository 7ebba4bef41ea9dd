from userhub.application.policies.ownership import authorize_self

__all__ = ["authorize_self"]
