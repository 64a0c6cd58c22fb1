"""
Graceful Degradation - correct implementation

Product data is the core feature; analytics, caching and personalised
recommendations are enhancements. Each enhancement is wrapped so its failure
is logged and replaced by a fallback, and the page reports which parts ran
in degraded mode.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


class ServiceUnavailable(Exception):
    pass


class AnalyticsService:
    def __init__(self, available: bool = True):
        self.available = available

    def track_event(self, name: str, **data) -> None:
        if not self.available:
            raise ServiceUnavailable("Analytics service unavailable")
        print(f"Analytics: {name} {data}")


class CacheService:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.entries: Dict[str, list] = {}

    def get(self, key: str):
        if self.fail:
            raise ServiceUnavailable("Cache service failed")
        return self.entries.get(key)

    def set(self, key: str, value) -> None:
        if self.fail:
            raise ServiceUnavailable("Cache service failed")
        self.entries[key] = value


class RecommendationEngine:
    def __init__(self, available: bool = True):
        self.available = available

    def recommendations(self, user_id) -> List[str]:
        if not self.available:
            raise ServiceUnavailable("Recommendation engine unavailable")
        return [f"Product {user_id}-{n}" for n in (1, 2, 3)]


class ProductNotFound(LookupError):
    pass


@dataclass
class ProductPage:
    product: dict
    recommendations: List[str] = field(default_factory=list)
    recommendations_type: str = "personalized"
    analytics: bool = True
    degraded: List[str] = field(default_factory=list)


class ProductService:
    def __init__(self, analytics: AnalyticsService, cache: CacheService, engine: RecommendationEngine):
        self.analytics = analytics
        self.cache = cache
        self.engine = engine
        self.products = [
            {"id": 1, "name": "Laptop", "price": 999},
            {"id": 2, "name": "Mouse", "price": 29},
            {"id": 3, "name": "Keyboard", "price": 79},
        ]

    def _track(self, name: str, **data) -> bool:
        try:
            self.analytics.track_event(name, **data)
            return True
        except ServiceUnavailable as e:
            print(f"Warning: analytics tracking failed, continuing without it: {e}")
            return False

    def _fallback_recommendations(self, product_id: int) -> List[str]:
        return [p["name"] for p in self.products if p["id"] != product_id][:2]

    def get_product(self, product_id: int) -> dict:
        self._track("product_view", product_id=product_id)
        for product in self.products:
            if product["id"] == product_id:
                return product
        raise ProductNotFound("Product not found")

    def search_products(self, query: str) -> List[dict]:
        key = f"search:{query}"
        try:
            cached: Optional[list] = self.cache.get(key)
            if cached:
                print("Cache hit")
                return cached
        except ServiceUnavailable as e:
            print(f"Warning: cache read failed, falling back to direct search: {e}")

        results = [p for p in self.products if query.lower() in p["name"].lower()]
        try:
            self.cache.set(key, results)
        except ServiceUnavailable as e:
            print(f"Warning: cache write failed, continuing without caching: {e}")
        return results

    def product_page(self, product_id: int, user_id) -> ProductPage:
        page = ProductPage(product=self.get_product(product_id))
        try:
            page.recommendations = self.engine.recommendations(user_id)
        except ServiceUnavailable as e:
            print(f"Warning: {e}, showing fallback recommendations")
            page.recommendations = self._fallback_recommendations(product_id)
            page.recommendations_type = "fallback"
            page.degraded.append("recommendations")
        page.analytics = self._track("page_view", product_id=product_id, user_id=user_id)
        if not page.analytics:
            page.degraded.append("analytics")
        return page


def main():
    print("=== Scenario 1: all services working ===")
    service = ProductService(AnalyticsService(), CacheService(), RecommendationEngine())
    print(service.get_product(1))
    print(service.search_products("key"))
    print(service.search_products("key"))
    print(service.product_page(1, 123))

    print("\n=== Scenario 2: analytics and cache down ===")
    service = ProductService(AnalyticsService(False), CacheService(True), RecommendationEngine())
    print(service.get_product(1))
    print(service.search_products("key"))

    print("\n=== Scenario 3: everything optional is down ===")
    service = ProductService(AnalyticsService(False), CacheService(True), RecommendationEngine(False))
    page = service.product_page(1, 123)
    print(f"Product page loaded: {page}")
    print(f"Degraded features: {', '.join(page.degraded)}")

    print("\n=== Scenario 4: the core itself fails ===")
    try:
        service.get_product(99)
    except ProductNotFound as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
