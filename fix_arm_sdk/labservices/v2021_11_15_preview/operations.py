from __future__ import annotations

from typing import ClassVar, Dict, Optional

from fix_arm_sdk.arm_client import ArmOperation, ArmResponse, NoBody, OperationGroup
from fix_arm_sdk.labservices.v2021_11_15_preview.models import (
    Image,
    ImageUpdate,
    InviteBody,
    Lab,
    LabPlan,
    LabPlanUpdate,
    LabServicesSku,
    LabUpdate,
    ListUsagesResult,
    Operation,
    OperationListResult,
    OperationResult,
    PagedImages,
    PagedLabPlans,
    PagedLabServicesSkus,
    PagedLabs,
    PagedSchedules,
    PagedUsers,
    PagedVirtualMachines,
    ResetPasswordBody,
    SaveImageBody,
    Schedule,
    ScheduleUpdate,
    Usage,
    User,
    UserUpdate,
    VirtualMachine,
)
from fix_arm_sdk.pager import Pageable

ApiVersion = "2021-11-15-preview"
FilterQuery = {"filter": "$filter"}

Subscription = "/subscriptions/{subscription_id}"
Provider = Subscription + "/providers/Microsoft.LabServices"
ResourceGroup = Subscription + "/resourceGroups/{resource_group_name}/providers/Microsoft.LabServices"
LabPlanPath = ResourceGroup + "/labPlans/{lab_plan_name}"
LabPath = ResourceGroup + "/labs/{lab_name}"


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


class Operations(OperationGroup):
    list_spec: ClassVar[ArmOperation] = spec(
        "GET", "/providers/Microsoft.LabServices/operations", {200: OperationListResult}
    )

    def list(self) -> Pageable[OperationListResult, Operation]:
        """Returns a list of all operations."""
        return self.client.pageable(self.list_spec, OperationListResult)


class OperationResultsOperations(OperationGroup):
    get_spec: ClassVar[ArmOperation] = spec(
        "GET", Provider + "/operationResults/{operation_result_id}", {200: OperationResult, 204: NoBody}
    )

    async def get(self, subscription_id: str, operation_result_id: str) -> ArmResponse[OperationResult]:
        """
        Returns an azure operation result.
        A status of 204 means, the operation result is not available (anymore): value is None.
        """
        return await self.client.call(
            self.get_spec, subscription_id=subscription_id, operation_result_id=operation_result_id
        )


class LabPlansOperations(OperationGroup):
    list_by_subscription_spec: ClassVar[ArmOperation] = spec(
        "GET", Provider + "/labPlans", {200: PagedLabPlans}, FilterQuery
    )
    list_by_resource_group_spec: ClassVar[ArmOperation] = spec("GET", ResourceGroup + "/labPlans", {200: PagedLabPlans})
    get_spec: ClassVar[ArmOperation] = spec("GET", LabPlanPath, {200: LabPlan})
    create_or_update_spec: ClassVar[ArmOperation] = spec(
        "PUT", LabPlanPath, {200: LabPlan, 201: LabPlan, 202: LabPlan}, body=LabPlan
    )
    update_spec: ClassVar[ArmOperation] = spec("PATCH", LabPlanPath, {200: LabPlan, 202: LabPlan}, body=LabPlanUpdate)
    delete_spec: ClassVar[ArmOperation] = spec("DELETE", LabPlanPath, {200: NoBody, 202: NoBody, 204: NoBody})
    save_image_spec: ClassVar[ArmOperation] = spec(
        "POST", LabPlanPath + "/saveImage", {200: NoBody, 202: NoBody}, body=SaveImageBody
    )

    def list_by_subscription(
        self, subscription_id: str, *, filter: Optional[str] = None
    ) -> Pageable[PagedLabPlans, LabPlan]:
        """Returns a list of all lab plans within a subscription"""
        return self.client.pageable(
            self.list_by_subscription_spec, PagedLabPlans, subscription_id=subscription_id, filter=filter
        )

    def list_by_resource_group(
        self, subscription_id: str, resource_group_name: str
    ) -> Pageable[PagedLabPlans, LabPlan]:
        """Returns a list of lab plans for a subscription and resource group."""
        return self.client.pageable(
            self.list_by_resource_group_spec,
            PagedLabPlans,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
        )

    async def get(self, subscription_id: str, resource_group_name: str, lab_plan_name: str) -> LabPlan:
        """Retrieves the properties of a Lab Plan."""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_plan_name=lab_plan_name,
        )

    async def create_or_update(
        self, subscription_id: str, resource_group_name: str, lab_plan_name: str, body: LabPlan
    ) -> ArmResponse[LabPlan]:
        """Operation to create or update a Lab Plan resource."""
        return await self.client.call(
            self.create_or_update_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_plan_name=lab_plan_name,
        )

    async def update(
        self, subscription_id: str, resource_group_name: str, lab_plan_name: str, body: LabPlanUpdate
    ) -> ArmResponse[LabPlan]:
        """Operation to update a Lab Plan resource."""
        return await self.client.call(
            self.update_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_plan_name=lab_plan_name,
        )

    async def delete(self, subscription_id: str, resource_group_name: str, lab_plan_name: str) -> ArmResponse[None]:
        """
        Operation to delete a Lab Plan resource.
        Deleting a lab plan does not delete labs associated with a lab plan, nor does it delete shared images
        added to a gallery via the lab plan permission container.
        """
        return await self.client.call(
            self.delete_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_plan_name=lab_plan_name,
        )

    async def save_image(
        self, subscription_id: str, resource_group_name: str, lab_plan_name: str, body: SaveImageBody
    ) -> ArmResponse[None]:
        """Saves an image from a lab VM to the attached shared image gallery."""
        return await self.client.call(
            self.save_image_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_plan_name=lab_plan_name,
        )


class ImagesOperations(OperationGroup):
    list_by_lab_plan_spec: ClassVar[ArmOperation] = spec(
        "GET", LabPlanPath + "/images", {200: PagedImages}, FilterQuery
    )
    get_spec: ClassVar[ArmOperation] = spec("GET", LabPlanPath + "/images/{image_name}", {200: Image})
    create_or_update_spec: ClassVar[ArmOperation] = spec(
        "PUT", LabPlanPath + "/images/{image_name}", {200: Image}, body=Image
    )
    update_spec: ClassVar[ArmOperation] = spec(
        "PATCH", LabPlanPath + "/images/{image_name}", {200: Image}, body=ImageUpdate
    )

    def list_by_lab_plan(
        self, subscription_id: str, resource_group_name: str, lab_plan_name: str, *, filter: Optional[str] = None
    ) -> Pageable[PagedImages, Image]:
        """Gets all images from galleries attached to a lab plan."""
        return self.client.pageable(
            self.list_by_lab_plan_spec,
            PagedImages,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_plan_name=lab_plan_name,
            filter=filter,
        )

    async def get(self, subscription_id: str, resource_group_name: str, lab_plan_name: str, image_name: str) -> Image:
        """Gets an image resource."""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_plan_name=lab_plan_name,
            image_name=image_name,
        )

    async def create_or_update(
        self, subscription_id: str, resource_group_name: str, lab_plan_name: str, image_name: str, body: Image
    ) -> Image:
        """Updates an image resource via PUT. Creating new resources via PUT will not function."""
        return await self.client.call(
            self.create_or_update_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_plan_name=lab_plan_name,
            image_name=image_name,
        )

    async def update(
        self, subscription_id: str, resource_group_name: str, lab_plan_name: str, image_name: str, body: ImageUpdate
    ) -> Image:
        """Updates an image resource."""
        return await self.client.call(
            self.update_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_plan_name=lab_plan_name,
            image_name=image_name,
        )


class LabsOperations(OperationGroup):
    list_by_subscription_spec: ClassVar[ArmOperation] = spec("GET", Provider + "/labs", {200: PagedLabs}, FilterQuery)
    list_by_resource_group_spec: ClassVar[ArmOperation] = spec("GET", ResourceGroup + "/labs", {200: PagedLabs})
    get_spec: ClassVar[ArmOperation] = spec("GET", LabPath, {200: Lab})
    create_or_update_spec: ClassVar[ArmOperation] = spec("PUT", LabPath, {200: Lab, 201: Lab, 202: Lab}, body=Lab)
    update_spec: ClassVar[ArmOperation] = spec("PATCH", LabPath, {200: Lab, 202: Lab}, body=LabUpdate)
    delete_spec: ClassVar[ArmOperation] = spec("DELETE", LabPath, {200: NoBody, 202: NoBody, 204: NoBody})
    publish_spec: ClassVar[ArmOperation] = spec("POST", LabPath + "/publish", {200: NoBody, 202: NoBody})
    sync_group_spec: ClassVar[ArmOperation] = spec("POST", LabPath + "/syncGroup", {200: NoBody, 202: NoBody})

    def list_by_subscription(self, subscription_id: str, *, filter: Optional[str] = None) -> Pageable[PagedLabs, Lab]:
        """Returns a list of all labs for a subscription."""
        return self.client.pageable(
            self.list_by_subscription_spec, PagedLabs, subscription_id=subscription_id, filter=filter
        )

    def list_by_resource_group(self, subscription_id: str, resource_group_name: str) -> Pageable[PagedLabs, Lab]:
        """Returns a list of all labs in a resource group."""
        return self.client.pageable(
            self.list_by_resource_group_spec,
            PagedLabs,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
        )

    async def get(self, subscription_id: str, resource_group_name: str, lab_name: str) -> Lab:
        """Returns the properties of a lab resource."""
        return await self.client.call(
            self.get_spec, subscription_id=subscription_id, resource_group_name=resource_group_name, lab_name=lab_name
        )

    async def create_or_update(
        self, subscription_id: str, resource_group_name: str, lab_name: str, body: Lab
    ) -> ArmResponse[Lab]:
        """Operation to create or update a lab resource."""
        return await self.client.call(
            self.create_or_update_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
        )

    async def update(
        self, subscription_id: str, resource_group_name: str, lab_name: str, body: LabUpdate
    ) -> ArmResponse[Lab]:
        """Operation to update a lab resource."""
        return await self.client.call(
            self.update_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
        )

    async def delete(self, subscription_id: str, resource_group_name: str, lab_name: str) -> ArmResponse[None]:
        """Operation to delete a lab resource."""
        return await self.client.call(
            self.delete_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
        )

    async def publish(self, subscription_id: str, resource_group_name: str, lab_name: str) -> ArmResponse[None]:
        """Publish or re-publish a lab. This will create or update all lab resources, such as virtual machines."""
        return await self.client.call(
            self.publish_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
        )

    async def sync_group(self, subscription_id: str, resource_group_name: str, lab_name: str) -> ArmResponse[None]:
        """Action used to manually kick off an AAD group sync job."""
        return await self.client.call(
            self.sync_group_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
        )


class SchedulesOperations(OperationGroup):
    list_by_lab_spec: ClassVar[ArmOperation] = spec("GET", LabPath + "/schedules", {200: PagedSchedules}, FilterQuery)
    get_spec: ClassVar[ArmOperation] = spec("GET", LabPath + "/schedules/{schedule_name}", {200: Schedule})
    create_or_update_spec: ClassVar[ArmOperation] = spec(
        "PUT", LabPath + "/schedules/{schedule_name}", {200: Schedule, 201: Schedule}, body=Schedule
    )
    update_spec: ClassVar[ArmOperation] = spec(
        "PATCH", LabPath + "/schedules/{schedule_name}", {200: Schedule}, body=ScheduleUpdate
    )
    delete_spec: ClassVar[ArmOperation] = spec(
        "DELETE", LabPath + "/schedules/{schedule_name}", {200: NoBody, 202: NoBody, 204: NoBody}
    )

    def list_by_lab(
        self, subscription_id: str, resource_group_name: str, lab_name: str, *, filter: Optional[str] = None
    ) -> Pageable[PagedSchedules, Schedule]:
        """Returns a list of all schedules for a lab."""
        return self.client.pageable(
            self.list_by_lab_spec,
            PagedSchedules,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            filter=filter,
        )

    async def get(self, subscription_id: str, resource_group_name: str, lab_name: str, schedule_name: str) -> Schedule:
        """Returns the properties of a lab Schedule."""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            schedule_name=schedule_name,
        )

    async def create_or_update(
        self, subscription_id: str, resource_group_name: str, lab_name: str, schedule_name: str, body: Schedule
    ) -> ArmResponse[Schedule]:
        """Operation to create or update a lab schedule."""
        return await self.client.call(
            self.create_or_update_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            schedule_name=schedule_name,
        )

    async def update(
        self, subscription_id: str, resource_group_name: str, lab_name: str, schedule_name: str, body: ScheduleUpdate
    ) -> Schedule:
        """Operation to update a lab schedule."""
        return await self.client.call(
            self.update_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            schedule_name=schedule_name,
        )

    async def delete(
        self, subscription_id: str, resource_group_name: str, lab_name: str, schedule_name: str
    ) -> ArmResponse[None]:
        """Operation to delete a schedule resource."""
        return await self.client.call(
            self.delete_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            schedule_name=schedule_name,
        )


class UsersOperations(OperationGroup):
    list_by_lab_spec: ClassVar[ArmOperation] = spec("GET", LabPath + "/users", {200: PagedUsers}, FilterQuery)
    get_spec: ClassVar[ArmOperation] = spec("GET", LabPath + "/users/{user_name}", {200: User})
    create_or_update_spec: ClassVar[ArmOperation] = spec(
        "PUT", LabPath + "/users/{user_name}", {200: User, 201: User, 202: User}, body=User
    )
    update_spec: ClassVar[ArmOperation] = spec(
        "PATCH", LabPath + "/users/{user_name}", {200: User, 202: User}, body=UserUpdate
    )
    delete_spec: ClassVar[ArmOperation] = spec(
        "DELETE", LabPath + "/users/{user_name}", {200: NoBody, 202: NoBody, 204: NoBody}
    )
    invite_spec: ClassVar[ArmOperation] = spec(
        "POST", LabPath + "/users/{user_name}/invite", {200: NoBody, 202: NoBody}, body=InviteBody
    )

    def list_by_lab(
        self, subscription_id: str, resource_group_name: str, lab_name: str, *, filter: Optional[str] = None
    ) -> Pageable[PagedUsers, User]:
        """Returns a list of all users for a lab."""
        return self.client.pageable(
            self.list_by_lab_spec,
            PagedUsers,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            filter=filter,
        )

    async def get(self, subscription_id: str, resource_group_name: str, lab_name: str, user_name: str) -> User:
        """Returns the properties of a lab user."""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            user_name=user_name,
        )

    async def create_or_update(
        self, subscription_id: str, resource_group_name: str, lab_name: str, user_name: str, body: User
    ) -> ArmResponse[User]:
        """Operation to create or update a lab user."""
        return await self.client.call(
            self.create_or_update_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            user_name=user_name,
        )

    async def update(
        self, subscription_id: str, resource_group_name: str, lab_name: str, user_name: str, body: UserUpdate
    ) -> ArmResponse[User]:
        """Operation to update a lab user."""
        return await self.client.call(
            self.update_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            user_name=user_name,
        )

    async def delete(
        self, subscription_id: str, resource_group_name: str, lab_name: str, user_name: str
    ) -> ArmResponse[None]:
        """Operation to delete a user resource."""
        return await self.client.call(
            self.delete_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            user_name=user_name,
        )

    async def invite(
        self, subscription_id: str, resource_group_name: str, lab_name: str, user_name: str, body: InviteBody
    ) -> ArmResponse[None]:
        """Operation to invite a user to a lab."""
        return await self.client.call(
            self.invite_spec,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            user_name=user_name,
        )


class VirtualMachinesOperations(OperationGroup):
    list_by_lab_spec: ClassVar[ArmOperation] = spec(
        "GET", LabPath + "/virtualMachines", {200: PagedVirtualMachines}, FilterQuery
    )
    get_spec: ClassVar[ArmOperation] = spec(
        "GET", LabPath + "/virtualMachines/{virtual_machine_name}", {200: VirtualMachine}
    )
    start_spec: ClassVar[ArmOperation] = spec(
        "POST", LabPath + "/virtualMachines/{virtual_machine_name}/start", {200: NoBody, 202: NoBody}
    )
    stop_spec: ClassVar[ArmOperation] = spec(
        "POST", LabPath + "/virtualMachines/{virtual_machine_name}/stop", {200: NoBody, 202: NoBody}
    )
    reimage_spec: ClassVar[ArmOperation] = spec(
        "POST", LabPath + "/virtualMachines/{virtual_machine_name}/reimage", {200: NoBody, 202: NoBody}
    )
    redeploy_spec: ClassVar[ArmOperation] = spec(
        "POST", LabPath + "/virtualMachines/{virtual_machine_name}/redeploy", {200: NoBody, 202: NoBody}
    )
    reset_password_spec: ClassVar[ArmOperation] = spec(
        "POST",
        LabPath + "/virtualMachines/{virtual_machine_name}/resetPassword",
        {200: NoBody, 202: NoBody},
        body=ResetPasswordBody,
    )

    def list_by_lab(
        self, subscription_id: str, resource_group_name: str, lab_name: str, *, filter: Optional[str] = None
    ) -> Pageable[PagedVirtualMachines, VirtualMachine]:
        """Returns a list of all virtual machines for a lab."""
        return self.client.pageable(
            self.list_by_lab_spec,
            PagedVirtualMachines,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            filter=filter,
        )

    async def get(
        self, subscription_id: str, resource_group_name: str, lab_name: str, virtual_machine_name: str
    ) -> VirtualMachine:
        """Returns the properties for a lab virtual machine."""
        return await self.client.call(
            self.get_spec,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            virtual_machine_name=virtual_machine_name,
        )

    async def _action(
        self,
        action: ArmOperation,
        subscription_id: str,
        resource_group_name: str,
        lab_name: str,
        virtual_machine_name: str,
        body: Optional[ResetPasswordBody] = None,
    ) -> ArmResponse[None]:
        return await self.client.call(
            action,
            body,
            subscription_id=subscription_id,
            resource_group_name=resource_group_name,
            lab_name=lab_name,
            virtual_machine_name=virtual_machine_name,
        )

    async def start(
        self, subscription_id: str, resource_group_name: str, lab_name: str, virtual_machine_name: str
    ) -> ArmResponse[None]:
        """Action to start a lab virtual machine."""
        return await self._action(self.start_spec, subscription_id, resource_group_name, lab_name, virtual_machine_name)

    async def stop(
        self, subscription_id: str, resource_group_name: str, lab_name: str, virtual_machine_name: str
    ) -> ArmResponse[None]:
        """Action to stop a lab virtual machine."""
        return await self._action(self.stop_spec, subscription_id, resource_group_name, lab_name, virtual_machine_name)

    async def reimage(
        self, subscription_id: str, resource_group_name: str, lab_name: str, virtual_machine_name: str
    ) -> ArmResponse[None]:
        """
        Re-image a lab virtual machine.
        The virtual machine will be deleted and recreated using the latest published snapshot
        of the reference environment of the lab.
        """
        return await self._action(
            self.reimage_spec, subscription_id, resource_group_name, lab_name, virtual_machine_name
        )

    async def redeploy(
        self, subscription_id: str, resource_group_name: str, lab_name: str, virtual_machine_name: str
    ) -> ArmResponse[None]:
        """Action to redeploy a lab virtual machine to a different compute node."""
        return await self._action(
            self.redeploy_spec, subscription_id, resource_group_name, lab_name, virtual_machine_name
        )

    async def reset_password(
        self,
        subscription_id: str,
        resource_group_name: str,
        lab_name: str,
        virtual_machine_name: str,
        body: ResetPasswordBody,
    ) -> ArmResponse[None]:
        """Resets a lab virtual machine password."""
        return await self._action(
            self.reset_password_spec, subscription_id, resource_group_name, lab_name, virtual_machine_name, body
        )


class SkusOperations(OperationGroup):
    list_spec: ClassVar[ArmOperation] = spec("GET", Provider + "/skus", {200: PagedLabServicesSkus}, FilterQuery)

    def list(
        self, subscription_id: str, *, filter: Optional[str] = None
    ) -> Pageable[PagedLabServicesSkus, LabServicesSku]:
        """Returns a list of all the Azure Lab Services resource SKUs."""
        return self.client.pageable(
            self.list_spec, PagedLabServicesSkus, subscription_id=subscription_id, filter=filter
        )


class UsagesOperations(OperationGroup):
    list_by_location_spec: ClassVar[ArmOperation] = spec(
        "GET", Provider + "/locations/{location}/usages", {200: ListUsagesResult}, FilterQuery
    )

    def list_by_location(
        self, subscription_id: str, location: str, *, filter: Optional[str] = None
    ) -> Pageable[ListUsagesResult, Usage]:
        """Returns list of usage per SKU family for the specified subscription in the specified region."""
        return self.client.pageable(
            self.list_by_location_spec,
            ListUsagesResult,
            subscription_id=subscription_id,
            location=location,
            filter=filter,
        )
