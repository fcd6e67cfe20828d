"""Tests du service entreprise (cache, creation/mise a jour, validation)."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from gestion_clinique.clients.entreprise_service import (
    EntrepriseCache, EntrepriseService, validate_entreprise_data,
)
from gestion_clinique.core.exceptions import (
    GestionCliniqueError, TransportError, ValidationError,
)
from gestion_clinique.models.entreprise import Entreprise, EntrepriseFormData


FORMULAIRE_VALIDE = {
    "ICE": "123", "CNSS": "456", "RC": "789", "IF": "111",
    "RIB": "222", "patente": "333", "adresse": "1 Rue X",
}


class FakeApi:
    """Remplace ApiClient : enregistre les appels, renvoie des reponses fixes."""

    def __init__(self, reponses=None, erreur=None):
        self.reponses = reponses or {}
        self.erreur = erreur
        self.appels = []

    def _appel(self, methode, endpoint, payload=None):
        self.appels.append((methode, endpoint, payload))
        if self.erreur:
            raise self.erreur
        return self.reponses.get((methode, endpoint), "")

    def get(self, endpoint):
        return self._appel("GET", endpoint)

    def post(self, endpoint, payload):
        return self._appel("POST", endpoint, payload)

    def put(self, endpoint, payload):
        return self._appel("PUT", endpoint, payload)

    def patch(self, endpoint, payload):
        return self._appel("PATCH", endpoint, payload)


class TestValidation:

    def test_formulaire_valide(self):
        assert validate_entreprise_data(FORMULAIRE_VALIDE) == []

    def test_ice_nul_et_adresse_vide(self):
        erreurs = validate_entreprise_data({
            "ICE": "0", "CNSS": "1", "RC": "1", "IF": "1",
            "RIB": "1", "patente": "1", "adresse": "",
        })
        assert len(erreurs) >= 2
        assert "L'ICE est obligatoire et doit être un nombre valide" in erreurs
        assert "L'adresse est obligatoire" in erreurs

    def test_tous_les_champs_manquants(self):
        erreurs = validate_entreprise_data(EntrepriseFormData())
        assert len(erreurs) == 7

    def test_adresse_espaces(self):
        data = dict(FORMULAIRE_VALIDE, adresse="   ")
        assert validate_entreprise_data(data) == ["L'adresse est obligatoire"]

    def test_valeur_non_numerique(self):
        data = dict(FORMULAIRE_VALIDE, RIB="abc")
        assert validate_entreprise_data(data) == [
            "Le RIB est obligatoire et doit être un nombre valide"
        ]

    def test_entiers_acceptes(self):
        data = dict(FORMULAIRE_VALIDE, ICE=123, CNSS=456)
        assert validate_entreprise_data(data) == []

    def test_ensure_valid(self):
        service = EntrepriseService(FakeApi())
        with pytest.raises(ValidationError) as exc:
            service.ensure_valid(dict(FORMULAIRE_VALIDE, adresse=""))
        assert exc.value.erreurs == ["L'adresse est obligatoire"]
        service.ensure_valid(FORMULAIRE_VALIDE)


class TestCache:

    def test_cycle_de_vie(self):
        cache = EntrepriseCache()
        assert cache.is_empty
        e = Entreprise(id=1)
        assert cache.store(e) is e
        assert cache.current is e
        cache.reset()
        assert cache.current is None


class TestLecture:

    def test_reponse_vide_renvoie_none_sans_cache(self):
        service = EntrepriseService(FakeApi({("GET", "entreprise"): ""}))
        assert service.get_entreprise() is None
        assert service.cache.is_empty

    def test_reponse_remplit_cache(self):
        api = FakeApi({("GET", "entreprise"): {"id": 7, "ICE": 1, "adresse": "A"}})
        service = EntrepriseService(api)
        e = service.get_entreprise()
        assert e.id == 7
        assert service.cache.current == e

    def test_erreur_transport_propagee(self):
        api = FakeApi(erreur=TransportError("Entreprise introuvable", status=500))
        service = EntrepriseService(api)
        with pytest.raises(TransportError) as exc:
            service.get_entreprise()
        assert str(exc.value) == "Erreur: Entreprise introuvable"
        assert exc.value.status == 500

    @pytest.mark.parametrize("reponse", [[], "x", 42, [{"id": 1}]])
    def test_reponse_non_objet_rejetee(self, reponse):
        service = EntrepriseService(FakeApi({("GET", "entreprise"): reponse}))
        with pytest.raises(TransportError) as exc:
            service.get_entreprise()
        assert exc.value.message == "Réponse invalide du serveur"
        assert service.cache.is_empty


class TestSauvegarde:

    def test_creation_si_cache_vide(self):
        api = FakeApi({("POST", "entreprise/"): {"id": 5}})
        service = EntrepriseService(api)
        e = service.save_entreprise(FORMULAIRE_VALIDE)
        methode, endpoint, payload = api.appels[-1]
        assert (methode, endpoint) == ("POST", "entreprise/")
        assert payload["ICE"] == 123
        assert e.id == 5
        assert e.ICE == 123
        assert e.created_at is not None
        assert service.cache.current is e

    def test_mise_a_jour_apres_creation(self):
        api = FakeApi({("POST", "entreprise/"): {"id": 5}})
        service = EntrepriseService(api)
        service.save_entreprise(FORMULAIRE_VALIDE)
        e = service.save_entreprise(dict(FORMULAIRE_VALIDE, adresse="2 Rue Y", RC="42"))
        methode, endpoint, payload = api.appels[-1]
        assert (methode, endpoint) == ("PATCH", "entreprise/5")
        assert payload["RC"] == 42
        assert e.id == 5
        assert e.adresse == "2 Rue Y"
        assert e.RC == 42

    def test_mise_a_jour_conserve_date_creation(self):
        api = FakeApi({("GET", "entreprise"): {
            "id": 9, "adresse": "A", "created_at": "2024-01-01T00:00:00Z",
        }})
        service = EntrepriseService(api)
        service.get_entreprise()
        e = service.save_entreprise(FORMULAIRE_VALIDE)
        assert api.appels[-1][:2] == ("PATCH", "entreprise/9")
        assert e.created_at == "2024-01-01T00:00:00Z"

    def test_cache_froid_tente_creation(self):
        # Profil existant cote serveur mais jamais lu : le cache decide seul.
        api = FakeApi({("POST", "entreprise/"): {"id": 1}})
        service = EntrepriseService(api)
        service.save_entreprise(FORMULAIRE_VALIDE)
        assert [a[0] for a in api.appels] == ["POST"]

    def test_update_sans_cache(self):
        service = EntrepriseService(FakeApi())
        with pytest.raises(GestionCliniqueError):
            service.update_entreprise(FORMULAIRE_VALIDE)

    def test_echec_creation_ne_remplit_pas_cache(self):
        api = FakeApi(erreur=TransportError("ICE deja utilise", status=400))
        service = EntrepriseService(api)
        with pytest.raises(TransportError, match="Erreur: ICE deja utilise"):
            service.create_entreprise(FORMULAIRE_VALIDE)
        assert service.cache.is_empty

    def test_cache_partage_entre_services(self):
        cache = EntrepriseCache()
        cache.store(Entreprise(id=3))
        api = FakeApi()
        EntrepriseService(api, cache).save_entreprise(FORMULAIRE_VALIDE)
        assert api.appels[-1][:2] == ("PATCH", "entreprise/3")
