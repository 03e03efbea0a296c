"""
Trend Digest - YouTube hashtag and posting-time digest for catalog marketing.
"""
