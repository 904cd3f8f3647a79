from fix_arm_sdk.arm_client import ArmClient, ArmServiceClient
from fix_arm_sdk.labservices.v2021_11_15_preview.operations import (
    ImagesOperations,
    LabPlansOperations,
    LabsOperations,
    OperationResultsOperations,
    Operations,
    SchedulesOperations,
    SkusOperations,
    UsagesOperations,
    UsersOperations,
    VirtualMachinesOperations,
)


class LabServicesClient(ArmServiceClient):
    """Lab Services with lab plans, api version 2021-11-15-preview."""

    def __init__(self, client: ArmClient) -> None:
        super().__init__(client)
        self.operations = Operations(client)
        self.operation_results = OperationResultsOperations(client)
        self.lab_plans = LabPlansOperations(client)
        self.images = ImagesOperations(client)
        self.labs = LabsOperations(client)
        self.schedules = SchedulesOperations(client)
        self.users = UsersOperations(client)
        self.virtual_machines = VirtualMachinesOperations(client)
        self.skus = SkusOperations(client)
        self.usages = UsagesOperations(client)
