HOSTING_FINGERPRINTS = [
    {
        "service": "GitHub Pages",
        "description": "GitHub Pages static hosting",
        "cnames": ["*.github.io", "*.github.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "There isn't a GitHub Pages site here", "weight": 10, "required": True},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "takeover_possible": True,
        "documentation": "https://docs.github.com/en/pages/configuring-a-custom-domain-for-your-github-pages-site",
        "poc": "Create a repository with GitHub Pages enabled and add the hostname as custom domain",
    },
    {
        "service": "Heroku",
        "description": "Heroku application platform",
        "cnames": ["*.herokuapp.com", "*.herokudns.com", "*.herokussl.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "No such app", "weight": 10},
            {"type": "http_body", "pattern": "no-such-app", "weight": 8},
            {"type": "http_body", "pattern": "There's nothing here, yet.", "weight": 6},
            {"type": "http_body", "pattern": "herokucdn.com/error-pages", "weight": 3},
        ],
        "min_confidence": 5,
        "takeover_possible": True,
        "poc": "Create a Heroku app and add the hostname as custom domain",
    },
    {
        "service": "Vercel",
        "description": "Vercel deployments",
        "cnames": ["*.vercel.app", "*.vercel-dns.com", "cname.vercel-dns.com", "*.now.sh"],
        "fingerprints": [
            {"type": "http_body", "pattern": "DEPLOYMENT_NOT_FOUND", "weight": 10, "required": True},
            {"type": "http_body", "pattern": "The deployment could not be found", "weight": 6},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "takeover_possible": True,
        "poc": "Create a Vercel project and add the hostname as domain",
    },
    {
        "service": "Netlify",
        "description": "Netlify static hosting",
        "cnames": ["*.netlify.app", "*.netlify.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Not Found - Request ID:", "weight": 8},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "min_confidence": 5,
        "takeover_possible": True,
        "poc": "Create a Netlify site and add the hostname as custom domain",
    },
    {
        "service": "Surge.sh",
        "description": "Surge static publishing",
        "cnames": ["*.surge.sh", "na-west1.surge.sh"],
        "fingerprints": [
            {"type": "http_body", "pattern": "project not found", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "documentation": "https://surge.sh/help/adding-a-custom-domain",
        "poc": "Publish a Surge project to the hostname",
    },
    {
        "service": "Fly.io",
        "description": "Fly.io application platform",
        "cnames": ["*.fly.dev", "*.edgeapp.net"],
        "fingerprints": [
            {"type": "dns_nxdomain"},
        ],
        "takeover_possible": True,
        "poc": "Create a Fly app with the same name and add a certificate for the hostname",
    },
    {
        "service": "Pantheon",
        "description": "Pantheon website hosting",
        "cnames": ["*.pantheonsite.io", "*.pantheon.io"],
        "fingerprints": [
            {"type": "http_body", "pattern": "The gods are wise, but do not know of the site which you seek.", "weight": 10, "required": True},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "takeover_possible": True,
        "documentation": "https://pantheon.io/docs/domains",
        "poc": "Create a Pantheon site and add the hostname as domain",
    },
    {
        "service": "Acquia",
        "description": "Acquia Cloud hosting",
        "cnames": ["*.acquia-sites.com", "*.acquia-test.co"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Web Site Not Found", "weight": 8},
            {"type": "http_body", "pattern": "The site you are looking for could not be found.", "weight": 8},
        ],
        "takeover_possible": False,
        "documentation": "Requires Acquia subscription verification",
    },
    {
        "service": "Kinsta",
        "description": "Kinsta managed WordPress hosting",
        "cnames": ["*.kinsta.cloud", "*.kinsta.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "No Site For Domain", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Create a Kinsta site and add the hostname as domain",
    },
    {
        "service": "Fastly",
        "description": "Fastly CDN",
        "cnames": ["*.fastly.net", "*.global.fastly.net"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Fastly error: unknown domain", "weight": 10, "required": True},
        ],
        "takeover_possible": False,
        "documentation": "Domain claims now require TLS or ownership verification",
    },
    {
        "service": "Readthedocs",
        "description": "Read the Docs documentation hosting",
        "cnames": ["*.readthedocs.io", "readthedocs.io"],
        "fingerprints": [
            {"type": "http_body", "pattern": "The link you have followed or the URL that you entered does not exist.", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Create a Read the Docs project and add the hostname as custom domain",
    },
]
