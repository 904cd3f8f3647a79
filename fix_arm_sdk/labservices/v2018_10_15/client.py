from fix_arm_sdk.arm_client import ArmClient, ArmServiceClient
from fix_arm_sdk.labservices.v2018_10_15.operations import (
    EnvironmentSettingsOperations,
    EnvironmentsOperations,
    GalleryImagesOperations,
    GlobalUsersOperations,
    LabAccountsOperations,
    LabsOperations,
    Operations,
    ProviderOperations,
    UsersOperations,
)


class LabServicesClient(ArmServiceClient):
    """
    Lab Services (classic) with api version 2018-10-15.

    >>> async with LabServicesClient.create(credential) as client:
    ...     async for account in client.lab_accounts.list_by_subscription("sub").items():
    ...         print(account.name)
    """

    def __init__(self, client: ArmClient) -> None:
        super().__init__(client)
        self.provider_operations = ProviderOperations(client)
        self.global_users = GlobalUsersOperations(client)
        self.lab_accounts = LabAccountsOperations(client)
        self.operations = Operations(client)
        self.gallery_images = GalleryImagesOperations(client)
        self.labs = LabsOperations(client)
        self.environment_settings = EnvironmentSettingsOperations(client)
        self.environments = EnvironmentsOperations(client)
        self.users = UsersOperations(client)
