"""Constants for Typescript services."""

# Package versions merged into every Typescript service. Dev packages are
# pinned toolchain versions and win over service supplied versions.
PACKAGES: dict[str, dict[str, dict[str, str]]] = {
    "typescript": {
        "pkg": {},
        "dev": {
            "typescript": "4.0.3",
            "@types/node": "14.14.0",
            "@typescript-eslint/eslint-plugin": "4.7.0",
            "@typescript-eslint/parser": "4.7.0",
            "eslint": "7.13.0",
            "eslint-plugin-jsdoc": "30.7.7",
            "prettier": "^2.1.2",
        },
    },
}

DEFAULT_SCRIPTS: dict[str, str] = {}

PACKAGE_FILE = "package.json"
TSCONFIG_FILE = "tsconfig.json"
TSCONFIG_BUILD_FILE = "tsconfig.build.json"
ESLINT_FILE = ".eslintrc.json"
SOURCE_DIR = "src"
INDEX_FILE = "index.ts"

# gitignore component for node_modules and friends
IGNORE_COMPONENT = "node"

JSON_INDENT = 4
