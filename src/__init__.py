"""
Streamflix - Couche d'orchestration formulaires -> API REST.

Ce package relie les soumissions de formulaires d'une page de demonstration
(comptes, catalogue, visionnages, notes, recommandations) a un backend JSON,
et affiche chaque resultat ou erreur dans la zone dediee du formulaire.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (payloads, ports document, coercion)
- services/ : Couche application (affichage, binder, handlers de formulaires)
- adapters/ : Couche infrastructure (client API, document en memoire, CLI)
"""
