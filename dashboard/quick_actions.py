from api.roles import UserRole


def quick_actions_for(role):
    """Static shortcut list shown on the dashboard for `role`."""
    if role == UserRole.MARKETING_MANAGER:
        return [
            {'label': 'Nouvelle campagne', 'href': '/marketing/campaigns/new', 'type': 'primary'},
            {'label': 'Envoyer newsletter', 'href': '/marketing/email/new', 'type': 'secondary'},
            {'label': 'Analyser audience', 'href': '/marketing/analytics', 'type': 'tertiary'},
            {'label': 'Gérer documents', 'href': '/resources', 'type': 'tertiary'},
        ]
    elif role == UserRole.TOUR_MANAGER:
        return [
            {'label': 'Nouvelle venue', 'href': '/booking/venues/new', 'type': 'primary'},
            {'label': 'Créer hold', 'href': '/booking/holds/new', 'type': 'secondary'},
            {'label': 'Optimiser routing', 'href': '/booking/routing', 'type': 'tertiary'},
            {'label': 'Documents tournée', 'href': '/resources', 'type': 'tertiary'},
        ]
    elif role == UserRole.FINANCIAL_MANAGER:
        return [
            {'label': 'Ajouter revenus', 'href': '/financial/revenue/new', 'type': 'primary'},
            {'label': 'Enregistrer dépense', 'href': '/financial/expenses/new', 'type': 'secondary'},
            {'label': 'Générer rapport', 'href': '/financial/reports/new', 'type': 'tertiary'},
            {'label': 'Voir royalties', 'href': '/financial/royalties', 'type': 'tertiary'},
        ]
    return [
        {'label': 'Nouveau projet', 'href': '/projects/new', 'type': 'primary'},
        {'label': 'Ajouter contact', 'href': '/contacts/new', 'type': 'secondary'},
        {'label': 'Gérer ressources', 'href': '/resources', 'type': 'tertiary'},
        {'label': 'Inviter équipe', 'href': '/team/invite', 'type': 'tertiary'},
    ]
