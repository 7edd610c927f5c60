CLOUD_FINGERPRINTS = [
    {
        "service": "AWS S3",
        "description": "Amazon S3 bucket website or REST endpoint",
        "cnames": [
            "s3.amazonaws.com",
            "*.s3.amazonaws.com",
            "*.s3-*.amazonaws.com",
            "*.s3.*.amazonaws.com",
            "*.s3-website-*.amazonaws.com",
            "*.s3-website.*.amazonaws.com",
        ],
        "fingerprints": [
            {"type": "http_body", "pattern": "NoSuchBucket", "weight": 10, "required": True},
            {"type": "http_body", "pattern": "The specified bucket does not exist", "weight": 3},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "negative_patterns": [
            {"type": "http_body", "pattern": "AccessDenied", "description": "Bucket exists (access denied)"},
            {"type": "http_body", "pattern": "ListBucketResult", "description": "Bucket exists and is listable"},
        ],
        "takeover_possible": True,
        "documentation": "https://docs.aws.amazon.com/AmazonS3/latest/userguide/VirtualHosting.html",
        "poc": "Create an S3 bucket with the same name in the matching region and enable static website hosting",
    },
    {
        "service": "AWS CloudFront",
        "description": "Amazon CloudFront distribution",
        "cnames": ["*.cloudfront.net"],
        "fingerprints": [
            {"type": "http_body", "pattern": "The request could not be satisfied", "weight": 6},
            {"type": "http_header", "header": "x-cache", "pattern": "Error from cloudfront", "weight": 3},
            {"type": "http_status", "value": 403, "weight": 1},
        ],
        "takeover_possible": True,
        "poc": "Create a CloudFront distribution and add the hostname as an alternate domain name",
    },
    {
        "service": "AWS Elastic Beanstalk",
        "description": "Elastic Beanstalk environment",
        "cnames": ["*.elasticbeanstalk.com"],
        "fingerprints": [
            {"type": "dns_nxdomain"},
        ],
        "takeover_possible": True,
        "documentation": "https://docs.aws.amazon.com/elasticbeanstalk/latest/dg/customdomains.html",
        "poc": "Create an Elastic Beanstalk environment with the same CNAME prefix in the same region",
    },
    {
        "service": "Azure",
        "description": "Microsoft Azure cloud services",
        "cnames": [
            "*.azurewebsites.net",
            "*.cloudapp.net",
            "*.cloudapp.azure.com",
            "*.trafficmanager.net",
            "*.blob.core.windows.net",
            "*.azure-api.net",
            "*.azurehdinsight.net",
            "*.azureedge.net",
            "*.azurecontainer.io",
            "*.database.windows.net",
            "*.azuredatalakestore.net",
            "*.search.windows.net",
            "*.azurecr.io",
            "*.redis.cache.windows.net",
            "*.servicebus.windows.net",
            "*.visualstudio.com",
        ],
        "fingerprints": [
            {"type": "dns_nxdomain"},
            {"type": "http_body", "pattern": "404 Web Site not found", "weight": 8},
        ],
        "takeover_possible": True,
        "documentation": "https://learn.microsoft.com/en-us/azure/security/fundamentals/subdomain-takeover",
        "poc": "Create the Azure resource with the same name",
    },
    {
        "service": "Google Cloud Storage",
        "description": "Google Cloud Storage bucket",
        "cnames": ["c.storage.googleapis.com", "*.storage.googleapis.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "<Code>NoSuchBucket</Code>", "weight": 10},
            {"type": "http_body", "pattern": "The specified bucket does not exist", "weight": 5},
        ],
        "takeover_possible": False,
        "documentation": "Bucket names matching domains require domain ownership verification",
    },
]
