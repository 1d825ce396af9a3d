"""
Test doubles for the recipe generator and region resolver
"""


class FakeGenerator:
    """Records calls and returns canned drafts (or raises)"""

    def __init__(self, drafts=None, error=None):
        self.drafts = drafts or []
        self.error = error
        self.calls = []

    async def generate(self, ingredients):
        self.calls.append(list(ingredients))
        if self.error:
            raise self.error
        return list(self.drafts)


class FakeRegionResolver:
    """Returns a fixed country code and counts lookups"""

    def __init__(self, country_code="default"):
        self.country_code = country_code
        self.calls = []

    async def resolve(self, latitude=None, longitude=None):
        self.calls.append((latitude, longitude))
        return self.country_code


class FakeLabelDetector:
    """Returns canned labels (or raises)"""

    def __init__(self, labels=None, error=None):
        self.labels = labels or []
        self.error = error
        self.calls = []

    async def detect(self, image_base64):
        self.calls.append(image_base64)
        if self.error:
            raise self.error
        return list(self.labels)
