"""
Graceful Degradation - violation

Analytics, caching and recommendations are called inline with no error
handling, so any one of them being down makes product lookups, search and
the product page fail even though the product data itself is available.
"""


class ServiceUnavailable(Exception):
    pass


class AnalyticsService:
    def __init__(self, available=True):
        self.available = available

    def track_event(self, name, **data):
        if not self.available:
            raise ServiceUnavailable("Analytics service unavailable")
        print(f"Analytics: {name} {data}")


class CacheService:
    def __init__(self, fail=False):
        self.fail = fail
        self.entries = {}

    def get(self, key):
        if self.fail:
            raise ServiceUnavailable("Cache service failed")
        return self.entries.get(key)

    def set(self, key, value):
        if self.fail:
            raise ServiceUnavailable("Cache service failed")
        self.entries[key] = value


class RecommendationEngine:
    def __init__(self, available=True):
        self.available = available

    def recommendations(self, user_id):
        if not self.available:
            raise ServiceUnavailable("Recommendation engine unavailable")
        return [f"Product {user_id}-{n}" for n in (1, 2, 3)]


class ProductService:
    def __init__(self, analytics, cache, engine):
        self.analytics = analytics
        self.cache = cache
        self.engine = engine
        self.products = [
            {"id": 1, "name": "Laptop", "price": 999},
            {"id": 2, "name": "Mouse", "price": 29},
            {"id": 3, "name": "Keyboard", "price": 79},
        ]

    def get_product(self, product_id):
        self.analytics.track_event("product_view", product_id=product_id)
        for product in self.products:
            if product["id"] == product_id:
                return product
        raise LookupError("Product not found")

    def search_products(self, query):
        key = f"search:{query}"
        cached = self.cache.get(key)
        if cached:
            return cached
        results = [p for p in self.products if query.lower() in p["name"].lower()]
        self.cache.set(key, results)
        return results

    def product_page(self, product_id, user_id):
        product = self.get_product(product_id)
        recommendations = self.engine.recommendations(user_id)
        self.analytics.track_event("page_view", product_id=product_id, user_id=user_id)
        return {"product": product, "recommendations": recommendations}


def attempt(label, call, complaint):
    print(f"\n=== {label} ===")
    try:
        print(call())
        print("Success!")
    except ServiceUnavailable as e:
        print(f"FAILED: {e}")
        print(complaint)


def main():
    healthy = ProductService(AnalyticsService(), CacheService(), RecommendationEngine())
    attempt("All services working", lambda: healthy.get_product(1), "")

    no_analytics = ProductService(AnalyticsService(False), CacheService(), RecommendationEngine())
    attempt("Analytics down", lambda: no_analytics.get_product(1),
            "Cannot get a product even though the product data is available!")

    no_cache = ProductService(AnalyticsService(), CacheService(True), RecommendationEngine())
    attempt("Cache down", lambda: no_cache.search_products("key"),
            "Cannot search even though the search works without a cache!")

    no_engine = ProductService(AnalyticsService(), CacheService(), RecommendationEngine(False))
    attempt("Recommendations down", lambda: no_engine.product_page(1, 123),
            "Cannot show a product because recommendations are unavailable!")


if __name__ == "__main__":
    main()
