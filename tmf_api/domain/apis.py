"""TM Forum API families served by this package and their self-link rules."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TMFApi:
    """One TM Forum Open API family, mounted under its own base path."""

    name: str
    base_path: str
    title: str

    def href(self, base_url: str, resource_path: str, *ids: str) -> str:
        """Build an absolute self-link: base URL + API base path + resource + id(s)."""
        parts = [
            base_url.rstrip("/"),
            self.base_path.strip("/"),
            resource_path.strip("/"),
            *ids,
        ]
        return "/".join(parts)


PRODUCT_CATALOG = TMFApi(
    name="productCatalogManagement",
    base_path="/tmf-api/productCatalogManagement/v4",
    title="TMF620 Product Catalog Management",
)
CUSTOMER = TMFApi(
    name="customerManagement",
    base_path="/tmf-api/customerManagement/v4",
    title="TMF629 Customer Management",
)
PARTY = TMFApi(
    name="partyManagement",
    base_path="/tmf-api/partyManagement/v4",
    title="TMF632 Party Management",
)
GEOGRAPHIC_ADDRESS = TMFApi(
    name="geographicAddressManagement",
    base_path="/tmf-api/geographicAddressManagement/v4",
    title="TMF673 Geographic Address Management",
)

ALL_APIS: dict[str, TMFApi] = {
    api.name: api
    for api in (PRODUCT_CATALOG, CUSTOMER, PARTY, GEOGRAPHIC_ADDRESS)
}
