"""
Couche domaine (core).

Contient les payloads echanges avec le backend, les ports du document et la
coercion des valeurs de formulaire. Cette couche n'a AUCUNE dependance vers
l'infrastructure (httpx, CLI).

Sous-packages :
- entities/ : Payloads sortants (UserRegistration, MovieCreate, TvSeriesCreate, ...)
- ports/ : Interfaces abstraites du document (IDocument, IElement, IFormElement)
- value_objects/ : Coercion texte -> nombre/booleen
"""
