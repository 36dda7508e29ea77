"""OAuth2 resource owner password credentials grant"""

__version__ = "0.1.0"
