from src.use_cases.dashboard import (
    GetChartDataUseCase,
    GetInsightsUseCase,
    GetRecentMovementsUseCase,
    GetStockStatisticsUseCase,
    LoadDashboardUseCase,
)
from src.use_cases.stock_items import (
    CreateStockItemUseCase,
    DeleteStockItemUseCase,
    GetAllStockItemsUseCase,
    GetStockItemByIdUseCase,
    UpdateStockItemUseCase,
)
from src.use_cases.stock_movements import (
    AddStockEntryUseCase,
    AddStockExitUseCase,
    DeleteStockEntryUseCase,
    DeleteStockExitUseCase,
    GetAllStockEntriesUseCase,
    GetAllStockExitsUseCase,
    GetStockEntriesByItemIdUseCase,
    GetStockExitsByItemIdUseCase,
    UpdateStockEntryUseCase,
    UpdateStockExitUseCase,
)
from src.use_cases.suppliers import (
    CreateSupplierUseCase,
    DeleteSupplierUseCase,
    GetAllSuppliersUseCase,
    GetSupplierByIdUseCase,
    GetSupplierStatisticsUseCase,
    GetSuppliersByCountryUseCase,
    UpdateSupplierUseCase,
)

__all__ = [
    "AddStockEntryUseCase",
    "AddStockExitUseCase",
    "CreateStockItemUseCase",
    "CreateSupplierUseCase",
    "DeleteStockEntryUseCase",
    "DeleteStockExitUseCase",
    "DeleteStockItemUseCase",
    "DeleteSupplierUseCase",
    "GetAllStockEntriesUseCase",
    "GetAllStockExitsUseCase",
    "GetAllStockItemsUseCase",
    "GetAllSuppliersUseCase",
    "GetChartDataUseCase",
    "GetInsightsUseCase",
    "GetRecentMovementsUseCase",
    "GetStockEntriesByItemIdUseCase",
    "GetStockExitsByItemIdUseCase",
    "GetStockItemByIdUseCase",
    "GetStockStatisticsUseCase",
    "GetSupplierByIdUseCase",
    "GetSupplierStatisticsUseCase",
    "GetSuppliersByCountryUseCase",
    "LoadDashboardUseCase",
    "UpdateStockEntryUseCase",
    "UpdateStockExitUseCase",
    "UpdateStockItemUseCase",
]
