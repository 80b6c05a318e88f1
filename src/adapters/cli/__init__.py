"""
Commandes CLI Typer de Streamflix (forms, submit, probe).
"""
