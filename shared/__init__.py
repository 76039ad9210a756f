# Modules shared by the storefront and cashflow services
