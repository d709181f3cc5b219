"""
SNMP data model for the hub's router status dump.

Hub 透過 HTTP 回傳扁平的 {OID: value} JSON；本模組將其還原為 SNMP 的
scalar / table 結構，再轉成 typed domain model 與 Prometheus gauges。

架構：
    OID              — immutable dotted identifier
    Snapshot         — one router status dump (OID → string)
    Row / Table      — table structure rebuilt from OID prefixes
    HubClient        — httpx fetcher for the router status endpoint
    BaseMetricGroup  — 每個 metric group 的基底 (status / downstream / ...)
    HubCollector     — fetch → extract → emit, fail-fast per scrape
"""
