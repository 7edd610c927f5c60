ECOMMERCE_FINGERPRINTS = [
    {
        "service": "Shopify",
        "description": "Shopify e-commerce",
        "cnames": ["*.myshopify.com", "shops.myshopify.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Sorry, this shop is currently unavailable", "weight": 10, "required": True},
            {"type": "http_body", "pattern": "Only one step left!", "weight": 9},
            {"type": "http_body", "pattern": "shopify", "weight": 3},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "negative_patterns": [
            {"type": "http_body", "pattern": "Add to cart", "description": "Active shop"},
            {"type": "http_body", "pattern": "checkout", "description": "Active shop"},
        ],
        "takeover_possible": True,
        "poc": "Create a Shopify store and add the hostname as custom domain",
    },
    {
        "service": "BigCommerce",
        "description": "BigCommerce platform",
        "cnames": ["*.bigcommerce.com", "*.mybigcommerce.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "<h1>Oops!</h1>", "weight": 8},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "takeover_possible": False,
        "documentation": "Requires store verification",
    },
]
