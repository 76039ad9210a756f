# Strictly Formals storefront service
