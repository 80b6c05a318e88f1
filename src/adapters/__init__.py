"""
Couche adaptateurs (infrastructure).

Implementations concretes des ports et points d'entree :
- api/ : Helpers de requete JSON (httpx) et erreurs d'echange
- dom/ : Document en memoire et page de demonstration
- cli/ : Commandes Typer pour soumettre les formulaires depuis le terminal
"""
