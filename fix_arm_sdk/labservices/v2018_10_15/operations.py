from __future__ import annotations

from typing import ClassVar, Dict, Optional, Any

from fix_arm_sdk.arm_client import ArmOperation, ArmResponse, NoBody, OperationGroup
from fix_arm_sdk.labservices.v2018_10_15.models import (
    AddUsersPayload,
    CreateLabProperties,
    Environment,
    EnvironmentFragment,
    EnvironmentOperationsPayload,
    EnvironmentSetting,
    EnvironmentSettingFragment,
    GalleryImage,
    GalleryImageFragment,
    GetEnvironmentResponse,
    GetPersonalPreferencesResponse,
    GetRegionalAvailabilityResponse,
    Lab,
    LabAccount,
    LabAccountFragment,
    LabFragment,
    ListEnvironmentsPayload,
    ListEnvironmentsResponse,
    ListLabsResponse,
    OperationBatchStatusPayload,
    OperationBatchStatusResponse,
    OperationMetadata,
    OperationResult,
    OperationStatusPayload,
    OperationStatusResponse,
    PersonalPreferencesOperationsPayload,
    ProviderOperationResult,
    PublishPayload,
    RegisterPayload,
    ResetPasswordPayload,
    ResponseWithContinuationEnvironment,
    ResponseWithContinuationEnvironmentSetting,
    ResponseWithContinuationGalleryImage,
    ResponseWithContinuationLab,
    ResponseWithContinuationLabAccount,
    ResponseWithContinuationUser,
    User,
    UserFragment,
)
from fix_arm_sdk.pager import Pageable

ApiVersion = "2018-10-15"
ListQuery = {"expand": "$expand", "filter": "$filter", "top": "$top", "orderby": "$orderby"}
ExpandQuery = {"expand": "$expand"}

Subscription = "/subscriptions/{subscription_id}"
ResourceGroup = Subscription + "/resourceGroups/{resource_group_name}/providers/Microsoft.LabServices"
LabAccountPath = ResourceGroup + "/labaccounts/{lab_account_name}"
LabPath = LabAccountPath + "/labs/{lab_name}"
EnvironmentSettingPath = LabPath + "/environmentsettings/{environment_setting_name}"
EnvironmentPath = EnvironmentSettingPath + "/environments/{environment_name}"
GlobalUserPath = "/providers/Microsoft.LabServices/users/{user_name}"


def spec(
    method: str,
    path: str,
    responses: Optional[Dict[int, Optional[type]]] = None,
    query_parameters: Optional[Dict[str, str]] = None,
    body: Optional[type] = None,
) -> ArmOperation:
    return ArmOperation(
        service="labservices",
        method=method,
        path=path,
        version=ApiVersion,
        responses=responses or {200: NoBody},
        query_parameters=query_parameters or {},
        body=body,
    )


class ProviderOperations(OperationGroup):
    list_spec: ClassVar[ArmOperation] = spec(
        "GET", "/providers/Microsoft.LabServices/operations", {200: ProviderOperationResult}
    )

    def list(self) -> Pageable[ProviderOperationResult, OperationMetadata]:
        """Result of the request to list REST API operations"""
        return self.client.pageable(self.list_spec, ProviderOperationResult)


class GlobalUsersOperations(OperationGroup):
    """
    Operations of a user independent of the lab account.
    All operations are POST requests on /providers/Microsoft.LabServices/users/{user_name}.
    """

    get_environment_spec: ClassVar[ArmOperation] = spec(
        "POST",
        GlobalUserPath + "/getEnvironment",
        {200: GetEnvironmentResponse},
        ExpandQuery,
        EnvironmentOperationsPayload,
    )
    get_operation_batch_status_spec: ClassVar[ArmOperation] = spec(
        "POST",
        GlobalUserPath + "/getOperationBatchStatus",
        {200: OperationBatchStatusResponse},
        body=OperationBatchStatusPayload,
    )
    get_operation_status_spec: ClassVar[ArmOperation] = spec(
        "POST", GlobalUserPath + "/getOperationStatus", {200: OperationStatusResponse}, body=OperationStatusPayload
    )
    get_personal_preferences_spec: ClassVar[ArmOperation] = spec(
        "POST",
        GlobalUserPath + "/getPersonalPreferences",
        {200: GetPersonalPreferencesResponse},
        body=PersonalPreferencesOperationsPayload,
    )
    list_environments_spec: ClassVar[ArmOperation] = spec(
        "POST", GlobalUserPath + "/listEnvironments", {200: ListEnvironmentsResponse}, body=ListEnvironmentsPayload
    )
    list_labs_spec: ClassVar[ArmOperation] = spec("POST", GlobalUserPath + "/listLabs", {200: ListLabsResponse})
    register_spec: ClassVar[ArmOperation] = spec("POST", GlobalUserPath + "/register", body=RegisterPayload)
    reset_password_spec: ClassVar[ArmOperation] = spec(
        "POST", GlobalUserPath + "/resetPassword", {200: NoBody, 202: NoBody}, body=ResetPasswordPayload
    )
    start_environment_spec: ClassVar[ArmOperation] = spec(
        "POST", GlobalUserPath + "/startEnvironment", {200: NoBody, 202: NoBody}, body=EnvironmentOperationsPayload
    )
    stop_environment_spec: ClassVar[ArmOperation] = spec(
        "POST", GlobalUserPath + "/stopEnvironment", {200: NoBody, 202: NoBody}, body=EnvironmentOperationsPayload
    )

    async def get_environment(
        self,
        user_name: str,
        environment_operations_payload: EnvironmentOperationsPayload,
        *,
        expand: Optional[str] = None,
    ) -> GetEnvironmentResponse:
        """Gets the virtual machine details"""
        return await self.client.call(
            self.get_environment_spec, environment_operations_payload, user_name=user_name, expand=expand
        )

    async def get_operation_batch_status(
        self, user_name: str, operation_batch_status_payload: OperationBatchStatusPayload
    ) -> OperationBatchStatusResponse:
        """Get batch operation status"""
        return await self.client.call(
            self.get_operation_batch_status_spec, operation_batch_status_payload, user_name=user_name
        )

    async def get_operation_status(
        self, user_name: str, operation_status_payload: OperationStatusPayload
    ) -> OperationStatusResponse:
        """Gets the status of long running operation"""
        return await self.client.call(self.get_operation_status_spec, operation_status_payload, user_name=user_name)

    async def get_personal_preferences(
        self, user_name: str, personal_preferences_operations_payload: PersonalPreferencesOperationsPayload
    ) -> GetPersonalPreferencesResponse:
        """Get personal preferences for a user"""
        return await self.client.call(
            self.get_personal_preferences_spec, personal_preferences_operations_payload, user_name=user_name
        )

    async def list_environments(
        self, user_name: str, list_environments_payload: ListEnvironmentsPayload
    ) -> ListEnvironmentsResponse:
        """List Environments for the user"""
        return await self.client.call(self.list_environments_spec, list_environments_payload, user_name=user_name)

    async def list_labs(self, user_name: str) -> ListLabsResponse:
        """List labs for the user."""
        return await self.client.call(self.list_labs_spec, user_name=user_name)

    async def register(self, user_name: str, register_payload: RegisterPayload) -> None:
        """Register a user to a managed lab"""
        await self.client.call(self.register_spec, register_payload, user_name=user_name)

    async def reset_password(self, user_name: str, reset_password_payload: ResetPasswordPayload) -> ArmResponse[None]:
        """Resets the user password on an environment This operation can take a while to complete"""
        return await self.client.call(self.reset_password_spec, reset_password_payload, user_name=user_name)

    async def start_environment(
        self, user_name: str, environment_operations_payload: EnvironmentOperationsPayload
    ) -> ArmResponse[None]:
        """Starts an environment by starting all resources inside the environment."""
        return await self.client.call(self.start_environment_spec, environment_operations_payload, user_name=user_name)

    async def stop_environment(
        self, user_name: str, environment_operations_payload: EnvironmentOperationsPayload
    ) -> ArmResponse[None]:
        """Stops an environment by stopping all resources inside the environment"""
        return await self.client.call(self.stop_environment_spec, environment_operations_payload, user_name=user_name)


class LabAccountsOperations(OperationGroup):
    list_by_subscription_spec: ClassVar[ArmOperation] = spec(
        "GET",
        Subscription + "/providers/Microsoft.LabServices/labaccounts",
        {200: ResponseWithContinuationLabAccount},
        ListQuery,
    )
    list_by_resource_group_spec: ClassVar[ArmOperation] = spec(
        "GET", ResourceGroup + "/labaccounts", {200: ResponseWithContinuationLabAccount}, ListQuery
    )
    get_spec: ClassVar[ArmOperation] = spec("GET", LabAccountPath, {200: LabAccount}, ExpandQuery)
    create_or_update_spec: ClassVar[ArmOperation] = spec(
        "PUT", LabAccountPath, {200: LabAccount, 201: LabAccount}, body=LabAccount
    )
    update_spec: ClassVar[ArmOperation] = spec("PATCH", LabAccountPath, {200: LabAccount}, body=LabAccountFragment)
    delete_spec: ClassVar[ArmOperation] = spec("DELETE", LabAccountPath, {202: NoBody, 204: NoBody})
    create_lab_spec: ClassVar[ArmOperation] = spec("POST", LabAccountPath + "/createLab", body=CreateLabProperties)
    get_regional_availability_spec: ClassVar[ArmOperation] = spec(
        "POST", LabAccountPath + "/getRegionalAvailability", {200: GetRegionalAvailabilityResponse}
    )

    def list_by_subscription(
        self,
        subscription_id: str,
        *,
        expand: Optional[str] = None,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        orderby: Optional[str] = None,
    ) -> Pageable[ResponseWithContinuationLabAccount, LabAccount]:
        """List lab accounts in a subscription."""
        return self.client.pageable(
            self.list_by_subscription_spec,
            ResponseWithContinuationLabAccount,
            subscription_id=subscription_id,
            expand=expand,
            filter=filter,
            top=top,
            orderby=orderby,
        )

    def list_by_resource_group(
        self,
        subscription_id: str,
        resource_group_name: str,
        *,
        expand: Optional[str] = None,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        orderby: Optional[str] = None,
    ) -> Pageable[ResponseWithContinuationLabAccount, LabAccount]:
        """List lab accounts in a resource group."""
        return self.client.pageable(
            self.list_by_resource_group_spec,
            ResponseWithContinuationLabAccount,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            expand=expand,
            filter=filter,
            top=top,
            orderby=orderby,
        )

    async def get(
        self, subscription_id: str, resource_group_name: str, lab_account_name: str, *, expand: Optional[str] = None
    ) -> LabAccount:
        """Get lab account"""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            expand=expand,
        )

    async def create_or_update(
        self, subscription_id: str, resource_group_name: str, lab_account_name: str, lab_account: LabAccount
    ) -> ArmResponse[LabAccount]:
        """Create or replace an existing Lab Account."""
        return await self.client.call(
            self.create_or_update_spec,
            lab_account,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
        )

    async def update(
        self, subscription_id: str, resource_group_name: str, lab_account_name: str, lab_account: LabAccountFragment
    ) -> LabAccount:
        """Modify properties of lab accounts."""
        return await self.client.call(
            self.update_spec,
            lab_account,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
        )

    async def delete(self, subscription_id: str, resource_group_name: str, lab_account_name: str) -> ArmResponse[None]:
        """Delete lab account. This operation can take a while to complete"""
        return await self.client.call(
            self.delete_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
        )

    async def create_lab(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        create_lab_properties: CreateLabProperties,
    ) -> None:
        """Create a lab in a lab account."""
        await self.client.call(
            self.create_lab_spec,
            create_lab_properties,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
        )

    async def get_regional_availability(
        self, subscription_id: str, resource_group_name: str, lab_account_name: str
    ) -> GetRegionalAvailabilityResponse:
        """Get regional availability information for each size category configured under a lab account"""
        return await self.client.call(
            self.get_regional_availability_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
        )


class Operations(OperationGroup):
    get_spec: ClassVar[ArmOperation] = spec(
        "GET",
        Subscription + "/providers/Microsoft.LabServices/locations/{location_name}/operations/{operation_name}",
        {200: OperationResult},
    )

    async def get(self, subscription_id: str, location_name: str, operation_name: str) -> OperationResult:
        """Get operation"""
        return await self.client.call(
            self.get_spec, subscription_id=subscription_id, location_name=location_name, operation_name=operation_name
        )


class LabAccountChildOperations(OperationGroup):
    """
    Shared implementation for all resources that live below a lab account.
    Subclasses define the specs and the path parameter that names a single resource.
    """

    list_spec: ClassVar[ArmOperation]
    get_spec: ClassVar[ArmOperation]
    create_or_update_spec: ClassVar[ArmOperation]
    update_spec: ClassVar[ArmOperation]
    delete_spec: ClassVar[ArmOperation]
    page_type: ClassVar[type]

    def _list(
        self,
        expand: Optional[str],
        filter: Optional[str],
        top: Optional[int],
        orderby: Optional[str],
        **path: str,
    ) -> Pageable[Any, Any]:
        return self.client.pageable(
            self.list_spec, self.page_type, expand=expand, filter=filter, top=top, orderby=orderby, **path
        )


class GalleryImagesOperations(LabAccountChildOperations):
    page_type = ResponseWithContinuationGalleryImage
    list_spec = spec("GET", LabAccountPath + "/galleryimages", {200: ResponseWithContinuationGalleryImage}, ListQuery)
    get_spec = spec("GET", LabAccountPath + "/galleryimages/{gallery_image_name}", {200: GalleryImage}, ExpandQuery)
    create_or_update_spec = spec(
        "PUT",
        LabAccountPath + "/galleryimages/{gallery_image_name}",
        {200: GalleryImage, 201: GalleryImage},
        body=GalleryImage,
    )
    update_spec = spec(
        "PATCH", LabAccountPath + "/galleryimages/{gallery_image_name}", {200: GalleryImage}, body=GalleryImageFragment
    )
    delete_spec = spec("DELETE", LabAccountPath + "/galleryimages/{gallery_image_name}", {200: NoBody, 204: NoBody})

    def list(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        *,
        expand: Optional[str] = None,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        orderby: Optional[str] = None,
    ) -> Pageable[ResponseWithContinuationGalleryImage, GalleryImage]:
        """List gallery images in a given lab account."""
        return self._list(
            expand,
            filter,
            top,
            orderby,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
        )

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        gallery_image_name: str,
        *,
        expand: Optional[str] = None,
    ) -> GalleryImage:
        """Get gallery image"""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            gallery_image_name=gallery_image_name,
            expand=expand,
        )

    async def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        gallery_image_name: str,
        gallery_image: GalleryImage,
    ) -> ArmResponse[GalleryImage]:
        """Create or replace an existing Gallery Image."""
        return await self.client.call(
            self.create_or_update_spec,
            gallery_image,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            gallery_image_name=gallery_image_name,
        )

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        gallery_image_name: str,
        gallery_image: GalleryImageFragment,
    ) -> GalleryImage:
        """Modify properties of gallery images."""
        return await self.client.call(
            self.update_spec,
            gallery_image,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            gallery_image_name=gallery_image_name,
        )

    async def delete(
        self, subscription_id: str, resource_group_name: str, lab_account_name: str, gallery_image_name: str
    ) -> ArmResponse[None]:
        """Delete gallery image."""
        return await self.client.call(
            self.delete_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            gallery_image_name=gallery_image_name,
        )


class LabsOperations(LabAccountChildOperations):
    page_type = ResponseWithContinuationLab
    list_spec = spec("GET", LabAccountPath + "/labs", {200: ResponseWithContinuationLab}, ListQuery)
    get_spec = spec("GET", LabPath, {200: Lab}, ExpandQuery)
    create_or_update_spec = spec("PUT", LabPath, {200: Lab, 201: Lab}, body=Lab)
    update_spec = spec("PATCH", LabPath, {200: Lab}, body=LabFragment)
    delete_spec = spec("DELETE", LabPath, {202: NoBody, 204: NoBody})
    add_users_spec: ClassVar[ArmOperation] = spec("POST", LabPath + "/addUsers", body=AddUsersPayload)
    register_spec: ClassVar[ArmOperation] = spec("POST", LabPath + "/register")

    def list(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        *,
        expand: Optional[str] = None,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        orderby: Optional[str] = None,
    ) -> Pageable[ResponseWithContinuationLab, Lab]:
        """List labs in a given lab account."""
        return self._list(
            expand,
            filter,
            top,
            orderby,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
        )

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        *,
        expand: Optional[str] = None,
    ) -> Lab:
        """Get lab"""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            expand=expand,
        )

    async def create_or_update(
        self, subscription_id: str, resource_group_name: str, lab_account_name: str, lab_name: str, lab: Lab
    ) -> ArmResponse[Lab]:
        """Create or replace an existing Lab."""
        return await self.client.call(
            self.create_or_update_spec,
            lab,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
        )

    async def update(
        self, subscription_id: str, resource_group_name: str, lab_account_name: str, lab_name: str, lab: LabFragment
    ) -> Lab:
        """Modify properties of labs."""
        return await self.client.call(
            self.update_spec,
            lab,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
        )

    async def delete(
        self, subscription_id: str, resource_group_name: str, lab_account_name: str, lab_name: str
    ) -> ArmResponse[None]:
        """Delete lab. This operation can take a while to complete"""
        return await self.client.call(
            self.delete_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
        )

    async def add_users(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        add_users_payload: AddUsersPayload,
    ) -> None:
        """Add users to a lab"""
        await self.client.call(
            self.add_users_spec,
            add_users_payload,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
        )

    async def register(
        self, subscription_id: str, resource_group_name: str, lab_account_name: str, lab_name: str
    ) -> None:
        """Register to managed lab."""
        await self.client.call(
            self.register_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
        )


class EnvironmentSettingsOperations(LabAccountChildOperations):
    page_type = ResponseWithContinuationEnvironmentSetting
    list_spec = spec(
        "GET", LabPath + "/environmentsettings", {200: ResponseWithContinuationEnvironmentSetting}, ListQuery
    )
    get_spec = spec("GET", EnvironmentSettingPath, {200: EnvironmentSetting}, ExpandQuery)
    create_or_update_spec = spec(
        "PUT", EnvironmentSettingPath, {200: EnvironmentSetting, 201: EnvironmentSetting}, body=EnvironmentSetting
    )
    update_spec = spec("PATCH", EnvironmentSettingPath, {200: EnvironmentSetting}, body=EnvironmentSettingFragment)
    delete_spec = spec("DELETE", EnvironmentSettingPath, {202: NoBody, 204: NoBody})
    claim_any_spec: ClassVar[ArmOperation] = spec("POST", EnvironmentSettingPath + "/claimAny")
    publish_spec: ClassVar[ArmOperation] = spec("POST", EnvironmentSettingPath + "/publish", body=PublishPayload)
    start_spec: ClassVar[ArmOperation] = spec("POST", EnvironmentSettingPath + "/start", {200: NoBody, 202: NoBody})
    stop_spec: ClassVar[ArmOperation] = spec("POST", EnvironmentSettingPath + "/stop", {200: NoBody, 202: NoBody})

    def list(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        *,
        expand: Optional[str] = None,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        orderby: Optional[str] = None,
    ) -> Pageable[ResponseWithContinuationEnvironmentSetting, EnvironmentSetting]:
        """List environment setting in a given lab."""
        return self._list(
            expand,
            filter,
            top,
            orderby,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
        )

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        *,
        expand: Optional[str] = None,
    ) -> EnvironmentSetting:
        """Get environment setting"""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            environment_setting_name=environment_setting_name,
            expand=expand,
        )

    async def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        environment_setting: EnvironmentSetting,
    ) -> ArmResponse[EnvironmentSetting]:
        """Create or replace an existing Environment Setting. This operation can take a while to complete"""
        return await self.client.call(
            self.create_or_update_spec,
            environment_setting,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            environment_setting_name=environment_setting_name,
        )

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        environment_setting: EnvironmentSettingFragment,
    ) -> EnvironmentSetting:
        """Modify properties of environment setting."""
        return await self.client.call(
            self.update_spec,
            environment_setting,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            environment_setting_name=environment_setting_name,
        )

    async def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
    ) -> ArmResponse[None]:
        """Delete environment setting. This operation can take a while to complete"""
        return await self.client.call(
            self.delete_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            environment_setting_name=environment_setting_name,
        )

    async def claim_any(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
    ) -> None:
        """Claims a random environment for a user in an environment settings"""
        await self.client.call(
            self.claim_any_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            environment_setting_name=environment_setting_name,
        )

    async def publish(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        publish_payload: PublishPayload,
    ) -> None:
        """Provisions/deprovisions required resources for an environment setting based on current state of the lab/environment setting."""  # noqa: E501
        await self.client.call(
            self.publish_spec,
            publish_payload,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            environment_setting_name=environment_setting_name,
        )

    async def start(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
    ) -> ArmResponse[None]:
        """Starts a template by starting all resources inside the template.
        This operation can take a while to complete
        """
        return await self.client.call(
            self.start_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            environment_setting_name=environment_setting_name,
        )

    async def stop(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
    ) -> ArmResponse[None]:
        """Stops a template by stopping all resources inside the template.
        This operation can take a while to complete
        """
        return await self.client.call(
            self.stop_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            environment_setting_name=environment_setting_name,
        )


class EnvironmentsOperations(LabAccountChildOperations):
    page_type = ResponseWithContinuationEnvironment
    list_spec = spec(
        "GET", EnvironmentSettingPath + "/environments", {200: ResponseWithContinuationEnvironment}, ListQuery
    )
    get_spec = spec("GET", EnvironmentPath, {200: Environment}, ExpandQuery)
    create_or_update_spec = spec("PUT", EnvironmentPath, {200: Environment, 201: Environment}, body=Environment)
    update_spec = spec("PATCH", EnvironmentPath, {200: Environment}, body=EnvironmentFragment)
    delete_spec = spec("DELETE", EnvironmentPath, {202: NoBody, 204: NoBody})
    claim_spec: ClassVar[ArmOperation] = spec("POST", EnvironmentPath + "/claim")
    reset_password_spec: ClassVar[ArmOperation] = spec(
        "POST", EnvironmentPath + "/resetPassword", {200: NoBody, 202: NoBody}, body=ResetPasswordPayload
    )
    start_spec: ClassVar[ArmOperation] = spec("POST", EnvironmentPath + "/start", {200: NoBody, 202: NoBody})
    stop_spec: ClassVar[ArmOperation] = spec("POST", EnvironmentPath + "/stop", {200: NoBody, 202: NoBody})

    def list(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        *,
        expand: Optional[str] = None,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        orderby: Optional[str] = None,
    ) -> Pageable[ResponseWithContinuationEnvironment, Environment]:
        """List environments in a given environment setting."""
        return self._list(
            expand,
            filter,
            top,
            orderby,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            environment_setting_name=environment_setting_name,
        )

    def _path(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        environment_name: str,
    ) -> Dict[str, str]:
        return dict(
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            environment_setting_name=environment_setting_name,
            environment_name=environment_name,
        )

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        environment_name: str,
        *,
        expand: Optional[str] = None,
    ) -> Environment:
        """Get environment"""
        path = self._path(
            subscription_id, resource_group_name, lab_account_name, lab_name, environment_setting_name, environment_name
        )
        return await self.client.call(self.get_spec, expand=expand, **path)

    async def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        environment_name: str,
        environment: Environment,
    ) -> ArmResponse[Environment]:
        """Create or replace an existing Environment."""
        path = self._path(
            subscription_id, resource_group_name, lab_account_name, lab_name, environment_setting_name, environment_name
        )
        return await self.client.call(self.create_or_update_spec, environment, **path)

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        environment_name: str,
        environment: EnvironmentFragment,
    ) -> Environment:
        """Modify properties of environments."""
        path = self._path(
            subscription_id, resource_group_name, lab_account_name, lab_name, environment_setting_name, environment_name
        )
        return await self.client.call(self.update_spec, environment, **path)

    async def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        environment_name: str,
    ) -> ArmResponse[None]:
        """Delete environment. This operation can take a while to complete"""
        path = self._path(
            subscription_id, resource_group_name, lab_account_name, lab_name, environment_setting_name, environment_name
        )
        return await self.client.call(self.delete_spec, **path)

    async def claim(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        environment_name: str,
    ) -> None:
        """Claims the environment and assigns it to the user"""
        path = self._path(
            subscription_id, resource_group_name, lab_account_name, lab_name, environment_setting_name, environment_name
        )
        await self.client.call(self.claim_spec, **path)

    async def reset_password(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        environment_name: str,
        reset_password_payload: ResetPasswordPayload,
    ) -> ArmResponse[None]:
        """Resets the user password on an environment This operation can take a while to complete"""
        path = self._path(
            subscription_id, resource_group_name, lab_account_name, lab_name, environment_setting_name, environment_name
        )
        return await self.client.call(self.reset_password_spec, reset_password_payload, **path)

    async def start(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        environment_name: str,
    ) -> ArmResponse[None]:
        """Starts an environment by starting all resources inside the environment."""
        path = self._path(
            subscription_id, resource_group_name, lab_account_name, lab_name, environment_setting_name, environment_name
        )
        return await self.client.call(self.start_spec, **path)

    async def stop(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        environment_setting_name: str,
        environment_name: str,
    ) -> ArmResponse[None]:
        """Stops an environment by stopping all resources inside the environment"""
        path = self._path(
            subscription_id, resource_group_name, lab_account_name, lab_name, environment_setting_name, environment_name
        )
        return await self.client.call(self.stop_spec, **path)


class UsersOperations(LabAccountChildOperations):
    page_type = ResponseWithContinuationUser
    list_spec = spec("GET", LabPath + "/users", {200: ResponseWithContinuationUser}, ListQuery)
    get_spec = spec("GET", LabPath + "/users/{user_name}", {200: User}, ExpandQuery)
    create_or_update_spec = spec("PUT", LabPath + "/users/{user_name}", {200: User, 201: User}, body=User)
    update_spec = spec("PATCH", LabPath + "/users/{user_name}", {200: User}, body=UserFragment)
    delete_spec = spec("DELETE", LabPath + "/users/{user_name}", {202: NoBody, 204: NoBody})

    def list(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        *,
        expand: Optional[str] = None,
        filter: Optional[str] = None,
        top: Optional[int] = None,
        orderby: Optional[str] = None,
    ) -> Pageable[ResponseWithContinuationUser, User]:
        """List users in a given lab."""
        return self._list(
            expand,
            filter,
            top,
            orderby,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
        )

    async def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        user_name: str,
        *,
        expand: Optional[str] = None,
    ) -> User:
        """Get user"""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            user_name=user_name,
            expand=expand,
        )

    async def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        user_name: str,
        user: User,
    ) -> ArmResponse[User]:
        """Create or replace an existing User."""
        return await self.client.call(
            self.create_or_update_spec,
            user,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            user_name=user_name,
        )

    async def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_account_name: str,
        lab_name: str,
        user_name: str,
        user: UserFragment,
    ) -> User:
        """Modify properties of users."""
        return await self.client.call(
            self.update_spec,
            user,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            user_name=user_name,
        )

    async def delete(
        self, subscription_id: str, resource_group_name: str, lab_account_name: str, lab_name: str, user_name: str
    ) -> ArmResponse[None]:
        """Delete user. This operation can take a while to complete"""
        return await self.client.call(
            self.delete_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_account_name=lab_account_name,
            lab_name=lab_name,
            user_name=user_name,
        )
